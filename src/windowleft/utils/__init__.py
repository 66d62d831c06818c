"""Small helpers shared by the windowleft modules."""
