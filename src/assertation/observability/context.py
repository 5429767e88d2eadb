from contextvars import ContextVar

ctx_validation_id = ContextVar("validation_id", default="-")
