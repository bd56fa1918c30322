"""Foundation toolkit: Option/Result types, strict formatting, UTF-8 helpers, file access, math helpers, call stacks and logging."""

__version__ = "0.1.0"