"""FastAPI service that hosts remote Mastermind games."""
