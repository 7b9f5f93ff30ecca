# =============================================================================
# travel_recommender/__init__.py
# =============================================================================
# The recommendation domain model and the queries over it.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, dotenv, or configures logging.
#   Every module here is pure Python - import it in a bare REPL with no
#   network access and it works.  The tool server (travel_tools/) and the
#   console demo (main.py) are the wiring; this package is the engine.
#
#   models.py    the four recommendation kinds (closed hierarchy)
#   service.py   filter / combine / describe / categorize
#   box.py       RecommendationBox, a one-slot typed container
#   catalog.py   the sample catalog
#   config.py    settings read from the environment
# =============================================================================
