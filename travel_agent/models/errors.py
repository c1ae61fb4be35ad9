class TravelAgentError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TravelAgentError):
    """Request body is not valid JSON or lacks a required field."""

    status_code = 400


class MethodError(TravelAgentError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class ModelInvocationError(TravelAgentError):
    """The model, or a tool it called, failed to produce an answer."""

    status_code = 500


def describe_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        if err.get("type") == "json_invalid":
            parts.append(str((err.get("ctx") or {}).get("error", err.get("msg"))))
            continue
        where = ".".join(str(p) for p in err.get("loc", ()))
        msg = str(err.get("msg"))
        parts.append(f"{where}: {msg}" if where else msg)
    return "Invalid JSON: " + "; ".join(parts)
