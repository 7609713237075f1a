"""Arabic sentence i'rab analyzer built with Reflex."""
