"""Services orchestrating the domain (session state, command dispatch)."""
