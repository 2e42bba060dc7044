"""WinRep weekly route planner backend."""
