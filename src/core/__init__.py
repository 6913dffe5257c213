"""
Core business logic for the Labour Chowk matching engine.

Submodules:
- exceptions: Error taxonomy shared by the engine and the repositories
- matching: Worker-job matching and rate suggestions
"""
