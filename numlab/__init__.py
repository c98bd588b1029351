"""Small experiments with natural numbers, primes, simple signals and a tiny REPL."""

__version__ = "0.1.0"