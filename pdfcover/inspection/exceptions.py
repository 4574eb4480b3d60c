class InspectionError(Exception):
    """Raised when a PDF cannot be inspected."""
