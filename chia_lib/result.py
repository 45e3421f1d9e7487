from typing import Any, Optional


class Result:
    def __init__(self, success: bool, data: Any = None, error: Optional[str] = None):
        self.success = success
        self.data = data
        self.error = error

    def __repr__(self) -> str:
        if self.success:
            return f"Result(success=True, data={self.data!r})"
        return f"Result(success=False, error={self.error!r})"
