"""Program generation errors.

Raised synchronously by the generator and its collaborators; never recovered
internally. Each carries the HTTP status the API answers with.
"""

from fastapi import status


class ProgramGenerationError(Exception):
    """Base for every error the program generator can surface."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "PROGRAM_GENERATION_ERROR"
    default_detail: str = "Program generation failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class CriteriaValidationError(ProgramGenerationError):
    """Criteria fail basic shape constraints (e.g. days_per_week not a positive integer)."""

    status_code = 422
    error_code = "VALIDATION_ERROR"
    default_detail = "Invalid program criteria"

    def __init__(self, detail: str | None = None, field: str | None = None):
        if field:
            self.error_code = f"VALIDATION_ERROR_{field.upper()}"
        self.field = field
        super().__init__(detail)


class NoCandidateExercises(ProgramGenerationError):
    """Filtering left no exercises to build a program from."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "NO_CANDIDATE_EXERCISES"
    default_detail = "No exercises match the given criteria. Adjust your criteria and try again."


class EmptyProgram(ProgramGenerationError):
    """Exercises matched but none could be distributed over the training days."""

    status_code = 422
    error_code = "EMPTY_PROGRAM"
    default_detail = "Matching exercises could not be distributed into a program"


class CatalogUnavailable(ProgramGenerationError):
    """The exercise catalog could not be loaded."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "CATALOG_UNAVAILABLE"
    default_detail = "Exercise catalog is unavailable"
