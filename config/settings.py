# DEPENDENCIES
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME                     : str            = "Contract Clause Risk Engine"
    APP_VERSION                  : str            = "1.0.0"

    # Scoring Settings
    SCORING_MODE                 : str            = "enhanced"   # "enhanced" or "legacy"
    DEFAULT_CONTRACT_TYPE        : str            = "freelance"
    DEFAULT_INDUSTRY             : str            = "general"

    # Semantic Channel Settings
    ENABLE_SEMANTIC              : bool           = True
    SIMILARITY_THRESHOLD         : float          = Field(default = 0.75, ge = 0.0, le = 1.0)
    SEMANTIC_TOP_K               : int            = 3
    MIN_SEMANTIC_CLAUSE_LENGTH   : int            = 50
    SEMANTIC_MAX_CONCURRENCY     : int            = 4
    SEMANTIC_CLAUSE_TIMEOUT      : float          = 0.0          # seconds, 0 disables
    VECTOR_INDEX_PATH            : Path           = Path("indexes/clause_patterns.npy")

    # Keyword Channel Settings
    KEYWORD_FALSE_POSITIVE_GUARD : bool           = False

    # Segmentation / Input Limits
    MIN_CONTRACT_LENGTH          : int            = 1
    MAX_CONTRACT_LENGTH          : int            = 500000       # Maximum characters (500KB text)
    MAX_CLAUSE_LENGTH            : int            = 1200
    MIN_HEADING_LENGTH           : int            = 60

    # Explanation Service (Ollama)
    ENABLE_EXPLANATIONS          : bool           = False
    OLLAMA_BASE_URL              : str            = "http://localhost:11434"
    OLLAMA_MODEL                 : str            = "llama3:8b"
    OLLAMA_TIMEOUT               : int            = 60
    OLLAMA_TEMPERATURE           : float          = 0.1
    EXPLANATION_MAX_TOKENS       : int            = 1024

    # Statute Reference
    GOV_URL                      : str            = "https://www.indiacode.nic.in/bitstream/123456789/2187/2/A187209.pdf"

    # Logging Settings
    LOG_LEVEL                    : str            = "INFO"
    LOG_DIR                      : Path           = Path("logs")
    LOG_APP_NAME                 : str            = "contract_risk"


    class Config:
        env_file          = ".env"
        env_file_encoding = "utf-8"
        case_sensitive    = True


    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure directories exist
        self.LOG_DIR.mkdir(parents = True, exist_ok = True)



# Global settings instance
settings = Settings()
