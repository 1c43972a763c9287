"""Browser front end for the game."""
