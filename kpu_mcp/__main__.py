from kpu_mcp.server import main

main()
