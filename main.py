# =============================================================================
# main.py  —  Entry Point for the Geo/Weather MCP Tool Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (only LOG_LEVEL is read, and only for logging)
#   2. Configures logging to stderr
#   3. Serves greet / geocode / get-weather over stdio until the client
#      disconnects
#
# The tools themselves take no configuration.  Hosting frameworks that
# embed the server should import tools.mcp_server.create_server instead.
# =============================================================================

from dotenv import load_dotenv

load_dotenv()

from tools.mcp_server import main


if __name__ == "__main__":
    main()
