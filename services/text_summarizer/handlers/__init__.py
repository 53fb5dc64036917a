from text_summarizer.handlers.summarization_handler import SummarizationHandler

__all__ = ["SummarizationHandler"]
