#!/usr/bin/env python
"""
Development convenience script to run the Code Context MCP server.
"""
import sys
import os

# Add src directory to path
src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src')
sys.path.insert(0, src_path)

from code_context_mcp.server import main

if __name__ == "__main__":
    main()
