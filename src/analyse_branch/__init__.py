from analyse_branch.domain.analyzer import DivergenceAnalyzer
from analyse_branch.domain.report import AnalysisResult, DivergenceReport

__all__ = ["AnalysisResult", "DivergenceAnalyzer", "DivergenceReport"]
__version__ = "0.1.0"
