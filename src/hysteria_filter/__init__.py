"""Drop hysteria-transport entries from proxy lists."""

from hysteria_filter.filter import is_hysteria, remove_hysteria

__all__ = ["is_hysteria", "remove_hysteria"]
