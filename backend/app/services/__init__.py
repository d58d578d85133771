"""Services Layer — one logic function per module: validate → fetch → check → mutate → save.

Invariants:
    - Each public function validates synchronously (ValidationError raised at call time)
      and returns a coroutine that performs the IO
    - No state retained between calls; repositories are the only IO seam

Design Decisions:
    - Sync validation wrapper + private async body: bad input fails before any
      awaitable exists, so no database access can happen for it
"""
