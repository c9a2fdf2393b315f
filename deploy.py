"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py
"""

import os
import subprocess
import sys

if __name__ == "__main__":
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_contract"],
        cwd=os.path.dirname(os.path.abspath(__file__))
    )

    sys.exit(result.returncode)
