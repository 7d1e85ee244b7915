"""Pokémon catalog viewer: a FastAPI front-end over the public PokeAPI."""
