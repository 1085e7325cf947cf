# claimcheck/core/analyzer.py

from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI
from claimcheck.errors import ProviderError


ANALYSIS_PROMPT = (
    "You are an AI misinformation educator.\n"
    "Input: A claim and its verdict (e.g., Misleading, Contradicted).\n"
    "Task: Explain in **simple, non-technical language** why the claim is misleading or suspicious.\n"
    "Give:\n"
    "1. A one-line summary\n"
    "2. A short explanation (max 3 bullet points)\n"
    "3. A tip for spotting similar misinformation in the future\n"
    "\n"
    "Output in Markdown.\n"
    "\n"
    "Claim: \"{claim}\""
)


class Analyzer:
    """
    Single-turn call to the generative-language provider.
    The claim is inserted into the prompt as-is; no timeout, retry or caching.
    """

    def __init__(self, llm=None, llm_factory=None):
        self.prompt = PromptTemplate.from_template(ANALYSIS_PROMPT)
        self.llm = llm
        self.llm_factory = llm_factory
        self.chain = self.prompt | llm if llm is not None else None

    @classmethod
    def from_settings(cls, settings) -> "Analyzer":
        # Client is created on the first analyze call
        def make_llm():
            return ChatOpenAI(
                model=settings.analysis_model,
                temperature=settings.analysis_temperature,
                api_key=settings.openai_api_key
            )
        return cls(llm_factory=make_llm)

    def build_prompt(self, claim: str) -> str:
        return self.prompt.format(claim=claim)

    def analyze(self, claim: str) -> str:
        try:
            if self.chain is None:
                self.llm = self.llm_factory()
                self.chain = self.prompt | self.llm
            result = self.chain.invoke({"claim": claim})
        except Exception as e:
            raise ProviderError("Analysis provider call failed") from e
        return result.content if hasattr(result, "content") else str(result)
