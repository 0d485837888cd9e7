"""saidify CLI - command-line SAID and version string utilities.

Usage:
    saidify --help                  # Show all available commands
    saidify said compute <input>    # Compute a SAID
    saidify said verify -           # Verify a SAID from stdin
    saidify version parse <vs>      # Parse a version string
"""
