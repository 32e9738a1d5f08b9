from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class NcmConfig:
    dataset_path: str = os.getenv("NCM_DATASET_PATH", "ncm.json")
    reference_date: str = os.getenv("NCM_REFERENCE_DATE", "")  # blank means today
    log_level: str = os.getenv("NCM_LOG_LEVEL", "WARNING")

NCM = NcmConfig()
