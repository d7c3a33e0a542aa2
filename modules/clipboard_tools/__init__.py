"""clipboard_tools: replace a file's contents with the clipboard (`rpp`)."""
