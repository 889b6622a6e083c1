"""Command line interface for genecache."""
