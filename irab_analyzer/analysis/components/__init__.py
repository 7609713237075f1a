from .results_panel import results_panel
from .sentence_form import sentence_form

__all__ = ["results_panel", "sentence_form"]
