# composite_gen/settings.py
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    """Where the generator reads its catalog from and writes its two modules to."""

    model_config = SettingsConfigDict(env_prefix="COMPOSITE_GEN_", env_file=".env", extra="ignore")

    # None reads the catalog packaged with composite_gen.meta
    catalog_path: Optional[Path] = None

    # Package holding the compute, computealpha and computebeta modules
    vendor_package: str = "gce_compute"

    # Import path of the emitted wrapper, used by the emitted tests
    wrapper_module: str = "composite.gen"

    wrapper_output: Path = Path("composite/gen.py")
    test_output: Path = Path("composite/test_gen.py")

    line_length: int = Field(default=100, gt=0)
