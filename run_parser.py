"""Parse a resume file from project root. Use: python run_parser.py path/to/cv.pdf [--mime TYPE]"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
app_dir = os.path.join(root, "resume_parser_ai")
args = [os.path.abspath(a) if os.path.isfile(a) else a for a in sys.argv[1:]]
os.chdir(app_dir)
sys.exit(subprocess.run([sys.executable, "-m", "cv_pipeline", *args]).returncode)
