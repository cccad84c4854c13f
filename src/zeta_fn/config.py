"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
import yaml

from zeta_fn.errors import InvalidArgumentError
from zeta_fn.result import Result, Success, Failure


# ============================================================
# memoize 설정
# ============================================================

class MemoizeConfig(BaseModel):
    """memoize 기본 설정"""
    key_digest: Literal["md5", "sha1", "sha256"] = "sha256"
    thread_safe: bool = True  # 래퍼별 lock으로 캐시 접근 보호

    model_config = {"frozen": True}


# ============================================================
# trampoline 설정
# ============================================================

class TrampolineConfig(BaseModel):
    """trampoline 기본 설정"""
    max_steps: int | None = Field(default=None, ge=1)  # None = 무제한

    model_config = {"frozen": True}


# ============================================================
# 전체 설정
# ============================================================

class FnConfig(BaseModel):
    """전체 라이브러리 설정"""
    memoize: MemoizeConfig = Field(default_factory=MemoizeConfig)
    trampoline: TrampolineConfig = Field(default_factory=TrampolineConfig)

    model_config = {"frozen": True}


DEFAULT_PATHS = (
    Path("zeta-fn.yaml"),
    Path("zeta-fn.yml"),
    Path.home() / ".config" / "zeta-fn" / "config.yaml",
)

_current = FnConfig()


def get_config() -> FnConfig:
    """현재 프로세스 기본 설정"""
    return _current


def set_config(config: FnConfig) -> FnConfig:
    """프로세스 기본 설정 교체, 이전 설정 반환"""
    global _current
    previous, _current = _current, config
    return previous


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, InvalidArgumentError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(InvalidArgumentError(str(path), "Config file not found"))
    except yaml.YAMLError as e:
        return Failure(InvalidArgumentError(str(path), f"Invalid YAML: {e}"))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(InvalidArgumentError(str(path), "Config root must be a mapping"))
    return Success(data)


def parse_config(data: dict) -> Result[FnConfig, InvalidArgumentError]:
    """딕셔너리를 FnConfig로 파싱"""
    try:
        return Success(FnConfig(**data))
    except (PydanticValidationError, TypeError) as e:
        # TypeError: 문자열이 아닌 최상위 키
        return Failure(InvalidArgumentError(data, str(e)))


def load_config(path: Path | str | None = None) -> Result[FnConfig, InvalidArgumentError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 기본 경로들을 탐색하고, 파일이 없으면 기본값을 사용한다.
    """
    if path is None:
        path = next((p for p in DEFAULT_PATHS if p.exists()), None)

    if path is None:
        return Success(FnConfig())

    yaml_result = load_yaml(Path(path))
    if isinstance(yaml_result, Failure):
        return yaml_result

    return parse_config(yaml_result.value)


def merge_config(base: FnConfig, overrides: dict) -> FnConfig:
    """설정 병합 (CLI 인자 등)"""
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return FnConfig(**deep_merge(base.model_dump(), overrides))
