# =============================================================================
# core/__init__.py
# =============================================================================
# All tool logic lives in this package: argument records and validation,
# the upstream adapters, the message templates, and the tool registry.
#
# Nothing in this package imports FastMCP.  The registry can be built and
# invoked from a bare Python REPL; tools/ only wires it to the protocol.
# =============================================================================
