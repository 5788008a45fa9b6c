"""
Voice command domain.

Pure logic: no I/O, no shared mutable state. Everything here is safe to
call concurrently.
"""
