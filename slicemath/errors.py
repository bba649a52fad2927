from __future__ import annotations

class OperandError(TypeError):
    def __init__(self, detail: str, name: str = "operand"):
        super().__init__(detail)
        self.detail = detail
        self.name = name
