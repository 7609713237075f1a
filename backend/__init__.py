"""Local stand-in for the remote Analysis Service."""
