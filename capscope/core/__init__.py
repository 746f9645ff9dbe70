"""Pure computational core: merge, compare, statistics, health, highlighting."""
