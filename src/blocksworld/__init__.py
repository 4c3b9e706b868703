"""Ground blocks-world commands into goal formulas and plan arm actions achieving them."""
