"""Machine and runner utilities.

Responsibilities:
  - Provide the stateful Machine and the asynchronous TransitionRunner.
  - Must not perform I/O; handlers own every side effect.
"""
