"""Serializable view of a parsed SvgBasicDocument."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgdraw.svg.document import PathSegment, SvgBasicDocument, TextNode


class SegmentModel(BaseModel):
    cmd: str
    args: list[float]
    class_name: str = ""
    is_polygon: bool = False

    @classmethod
    def from_segment(cls, seg: PathSegment) -> "SegmentModel":
        return cls(cmd=seg.cmd, args=list(seg.args), class_name=seg.class_name, is_polygon=seg.is_polygon)


class TextModel(BaseModel):
    lines: list[str] = Field(default_factory=list)
    class_name: str = ""
    transform: str = ""
    x: float = 0.0
    y: float = 0.0
    font_scale: float = 1.0
    rotation: float = 0.0
    style: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_node(cls, node: TextNode) -> "TextModel":
        return cls(
            lines=list(node.lines),
            class_name=node.class_name,
            transform=node.transform,
            x=node.x,
            y=node.y,
            font_scale=node.font_scale,
            rotation=node.rotation,
            style=dict(node.style.raw),
        )


class PathErrorModel(BaseModel):
    index: int
    class_name: str = ""
    message: str


class SvgBasicDocumentModel(BaseModel):
    """Represents a parsed basic SVG."""

    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    paths: list[list[SegmentModel]] = Field(default_factory=list)
    texts: list[TextModel] = Field(default_factory=list)
    styles: dict[str, dict[str, str]] = Field(default_factory=dict)
    path_errors: list[PathErrorModel] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: SvgBasicDocument) -> "SvgBasicDocumentModel":
        return cls(
            width=doc.width,
            height=doc.height,
            x=doc.x,
            y=doc.y,
            paths=[[SegmentModel.from_segment(seg) for seg in path] for path in doc.segments],
            texts=[TextModel.from_node(node) for node in doc.texts],
            styles=doc.styles.as_dict(),
            path_errors=[
                PathErrorModel(index=e.index, class_name=e.class_name, message=e.message) for e in doc.path_errors
            ],
        )
