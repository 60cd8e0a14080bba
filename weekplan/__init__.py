"""weekplan - personal course and event schedule with conflict checking."""
