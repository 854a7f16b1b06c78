"""Self-registering update orchestrator for command-line tool projects."""
