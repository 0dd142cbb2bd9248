"""Pipeline stages for Life Morale Index scoring."""
