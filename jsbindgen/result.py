from enum import Enum
from datetime import datetime
from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .generator.class_bindings import GeneratedUnit


class GenerationStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


class GenerationResult:
    def __init__(
        self,
        class_name: str,
        status: GenerationStatus,
        message: str,
        unit: Optional['GeneratedUnit'] = None,
        timestamp: Optional[str] = None
    ):
        if not isinstance(status, GenerationStatus):
            raise TypeError(f"status must be GenerationStatus enum, got {type(status)}")

        self.class_name = class_name
        self.status = status
        self.message = message
        self.unit = unit
        self.timestamp = timestamp or datetime.now().isoformat()

    @property
    def succeeded(self) -> bool:
        return self.status == GenerationStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'class_name': self.class_name,
            'status': self.status.value,
            'message': self.message,
            'timestamp': self.timestamp
        }

        if self.unit is not None:
            result_dict['file_name'] = self.unit.file_name

        return result_dict
