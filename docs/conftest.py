from sybil import Sybil
from sybil.parsers.markdown import PythonCodeBlockParser
import jax
import matplotlib

jax.config.update("jax_enable_x64", True)
matplotlib.use("Agg")

# Run the Python code blocks of the Markdown pages as tests
pytest_collect_file = Sybil(
    parsers=[
        PythonCodeBlockParser(),
    ],
    patterns=["*.md"],
).pytest()
