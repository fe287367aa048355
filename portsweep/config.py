from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class ScanConfig(BaseModel):
    """
    Immutable scan parameters, built once at startup.
    Worker count and timeouts are validated; port bounds are not.
    """
    model_config = ConfigDict(frozen=True)

    targets: str = "scanme.nmap.org"
    start_port: int = 1
    end_port: int = 1024
    port_list: Optional[str] = None
    workers: int = Field(100, ge=1, le=5000)
    timeout: float = Field(5.0, gt=0)
    retries: int = Field(3, ge=1)
    backoff_base: float = Field(1.0, ge=0)
    json_output: bool = False
    output_file: Optional[str] = None
    sort_results: bool = False
    show_progress: bool = True
