"""
Repo-Prompt: Turn a GitHub repository into a single LLM-ready prompt file.

Clones the repository into a throwaway workspace, runs repomix over it and
copies the packed output to a path of your choice.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
