"""Basic SVG decoding: styles, path data, text transforms."""
