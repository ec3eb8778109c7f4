"""Value and breakout scoring for basketball player seasons."""
