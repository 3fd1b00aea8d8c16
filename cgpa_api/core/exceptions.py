class CourseRecordError(Exception):
    """Base class for errors answered directly to the client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CourseRecordError):
    status_code = 400


class NotFoundError(CourseRecordError):
    status_code = 404
