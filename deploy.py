"""
Contract Deployment Entry Point
Runs deployer.cli for the LandForm contract
"""

import sys

from deployer.cli import main

if __name__ == "__main__":
    sys.exit(main())
