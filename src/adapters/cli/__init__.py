"""
Adaptateur CLI (Typer + Rich).

Les commandes sont definies dans commands/ et montees dans src/main.py.
"""
