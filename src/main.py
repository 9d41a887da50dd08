"""Main entry point for the terminal todo list.

Tasks live only in memory; quitting discards them.
"""
from app import TodoApp
from cli import CLI
from logging_setup import setup_logging


def main():
    setup_logging()
    cli = CLI(TodoApp())
    cli.run()

if __name__ == "__main__":
    main()
