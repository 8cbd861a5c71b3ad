"""statusline - one-line session summary for an interactive coding assistant.

Reads the JSON status payload the assistant shell writes to stdin and prints
the model, directory, git branch, token count and context usage.

Main modules:
    - cli: Command-line interface (statusline command)
    - render: Status line assembly
    - context: Payload parsing, token formatting and usage percentages
    - core: Config, paths, stdin reader, git lookup, debug log
"""

__version__ = "0.1.0"
