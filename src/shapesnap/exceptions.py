"""Exception hierarchy for Shapesnap.

Recognition itself never raises: a stroke either becomes a shape, falls
back to a polyline or is discarded. These errors cover the edges of the
package, where recorded strokes are loaded and results are written.
"""


class ShapesnapError(Exception):
    """Base exception for all Shapesnap errors."""

    pass


class StrokeFileError(ShapesnapError):
    """Errors related to loading recorded strokes."""

    pass


class StrokeLoadError(StrokeFileError):
    """Error reading a stroke file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load strokes from '{path}': {reason}")


class StrokeFormatError(StrokeFileError):
    """Stroke file has an unsupported or invalid layout."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid stroke file '{path}': {details}")


class ResultSaveError(ShapesnapError):
    """Error writing recognition results."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save results to '{path}': {reason}")


class ShapeDataError(ShapesnapError):
    """Serialized shape payload could not be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid shape data: {reason}")
