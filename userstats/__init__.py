"""User Stats — load user CSVs and report counts, averages and rankings."""
