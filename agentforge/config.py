from pydantic_settings import BaseSettings

from agentforge.core.generation.models import BlockchainNetwork


class Settings(BaseSettings):
    # LLM
    llm_provider: str = "openai"
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    deepseek_api_key: str = ""
    llm_api_key: str = ""  # Generic key, used when provider-specific key is empty
    llm_model: str = "gpt-4o"
    llm_base_url: str = ""  # Custom base URL for openai_compatible provider

    # Generation
    document_temperature: float = 0.2
    document_max_tokens: int = 4096
    support_temperature: float = 0.3
    code_max_tokens: int = 3000
    test_max_tokens: int = 2000
    blockchain_network: BlockchainNetwork = BlockchainNetwork.DEVNET

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Output
    output_dir: str = "./generated-skills"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
