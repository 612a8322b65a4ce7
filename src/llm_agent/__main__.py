import sys

from llm_agent.cli import main

sys.exit(main())
