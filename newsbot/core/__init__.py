"""Pure domain logic: vector math, ranking, prompt building and exceptions."""
