"""
Launcher script for the TubeTrans Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="TubeTrans Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--model", help="Gemini model to use (default: GEMINI_MODEL or gemini-3-flash-preview)")
    args = parser.parse_args()

    # Get the absolute path of the app directory
    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "tubetrans" / "frontend" / "streamlit_app.py"

    # Set up environment variables
    env = os.environ.copy()

    if args.model:
        env["GEMINI_MODEL"] = args.model

    # Add the project root to PYTHONPATH to fix import issues
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    # Print startup info
    print(f"Starting TubeTrans Streamlit app on port {args.port}")
    if not (env.get("GEMINI_API_KEY") or env.get("API_KEY")):
        print("WARNING: GEMINI_API_KEY is not set, requests will fail.")

    # Construct the command to run Streamlit
    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]

    # Run Streamlit app
    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
