# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP binding of the core tool registry.
#
# tools/ is the translation layer between MCP and core/:
#   1. Each registry entry becomes a FastMCP tool with typed parameters
#      (so clients see the argument constraints in the JSON schema)
#   2. Each call is delegated to core.registry.invoke()
#   3. The Envelope is converted into a FastMCP ToolResult
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT format messages or talk to upstream APIs (that's core/)
#   - They do NOT catch upstream errors (handlers already did)
# =============================================================================
