"""Product naming shared by the CLI and terminal output."""

CLI_PRIMARY_COMMAND = "capscope"
