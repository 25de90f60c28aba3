from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendConfig(BaseModel):
    """모델 백엔드 설정"""

    backend: str | None = None
    model: str | None = None


class GenerationOptions(BaseModel):
    """PR 설명 생성 옵션 - Dispatcher 호출 시점에 명시적으로 전달"""

    style: str = "default"
    include_template: bool = True
    backend: BackendConfig = BackendConfig()


def resolve_backend_config(
    override: BackendConfig | None, default: BackendConfig | None
) -> BackendConfig:
    """기능별 override가 프로세스 기본값보다 우선

    override가 백엔드를 지정하면 기본값의 모델은 따라가지 않는다.
    모델만 지정한 override는 기본 백엔드에 적용된다.
    """
    override = override or BackendConfig()
    default = default or BackendConfig()
    if override.backend:
        return BackendConfig(backend=override.backend, model=override.model)
    return BackendConfig(
        backend=default.backend,
        model=override.model or default.model,
    )


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # 프로세스 기본 백엔드: "openai", "vllm", "gemini"
    llm_provider: str = ""
    llm_model: str = ""

    # PR 설명 생성 전용 override
    pr_llm_provider: str = ""
    pr_llm_model: str = ""

    # 프롬프트 스타일: "default" 또는 "conventional"
    prompt_style: str = "default"
    include_template: bool = True

    # OpenAI 설정
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 120.0

    # vLLM 설정
    vllm_api_url: str = ""
    vllm_api_key: str = ""
    vllm_model: str = ""
    vllm_timeout: float = 180.0

    # Gemini 설정
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout: float = 120.0

    # Git
    git_repo_path: str = "."
    git_timeout: float = 10.0

    # 로깅 설정
    log_level: str = "INFO"

    # Rate limit
    rate_limit_default: str = "120/minute"

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def backend_config(self) -> BackendConfig:
        """PR 설명 생성에 사용할 백엔드 설정 반환"""
        return resolve_backend_config(
            BackendConfig(
                backend=self.pr_llm_provider or None,
                model=self.pr_llm_model or None,
            ),
            BackendConfig(
                backend=self.llm_provider or None,
                model=self.llm_model or None,
            ),
        )

    def generation_options(self) -> GenerationOptions:
        """현재 설정으로 생성 옵션 구성"""
        return GenerationOptions(
            style=self.prompt_style,
            include_template=self.include_template,
            backend=self.backend_config(),
        )

    def validate_for_production(self) -> list[str]:
        """프로덕션 환경에서 필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        backend = self.backend_config().backend
        if not backend:
            errors.append("LLM_PROVIDER")
        elif backend == "openai" and not self.openai_api_key:
            errors.append("OPENAI_API_KEY")
        elif backend == "vllm" and not self.vllm_api_url:
            errors.append("VLLM_API_URL")
        elif backend == "gemini" and not self.gemini_api_key:
            errors.append("GEMINI_API_KEY")
        return errors

    @model_validator(mode="after")
    def validate_prompt_style(self):
        """프롬프트 스타일 검증"""
        if self.prompt_style not in ("default", "conventional"):
            raise ValueError(f"지원하지 않는 프롬프트 스타일: {self.prompt_style}")
        return self


settings = Settings()
