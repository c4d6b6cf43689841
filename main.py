"""Main entry point: console bill splitter, or the Streamlit app with --web"""
import subprocess
import sys
from pathlib import Path
import dotenv

dotenv.load_dotenv()

def main():
    """Run the console splitter, or the Streamlit frontend when passed --web"""
    if "--web" in sys.argv[1:]:
        frontend_dir = Path(__file__).parent / "frontend"
        subprocess.run([sys.executable, "-m", "streamlit", "run", "app.py"], cwd=frontend_dir)
        return

    from billsplit.console import main as console_main
    console_main()

if __name__ == "__main__":
    main()
