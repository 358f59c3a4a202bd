"""Solutions to classic competitive-programming problems, one function or class per problem."""

__version__ = "0.1.0"