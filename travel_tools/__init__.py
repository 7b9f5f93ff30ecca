# =============================================================================
# travel_tools/__init__.py
# =============================================================================
# FastMCP tool wrappers over the travel_recommender package.
#
# ARCHITECTURAL ROLE:
#   This is the translation layer between an MCP client and the domain
#   model.  Each tool:
#     1. Calls a pure function from travel_recommender/
#     2. Converts the result into a plain dict for JSON transport
#     3. Logs the request and the response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in travel_recommender/)
#   - They do NOT modify the catalog (every tool is read-only)
# =============================================================================
