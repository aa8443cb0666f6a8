# topmark:header:start
#
#   project      : CargoFmt
#   file         : __init__.py
#   file_relpath : src/cargofmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core types shared by the config, pipeline and CLI layers."""
