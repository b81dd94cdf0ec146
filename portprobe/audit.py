"""审计日志系统。"""
import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any
from enum import Enum

from .models import ScanConfig, ScanOutcome


class AuditEventType(str, Enum):
    """审计事件类型。"""
    SCAN_START = "scan_start"
    PORT_OPEN = "port_open"
    SCAN_COMPLETE = "scan_complete"
    SCAN_FAILED = "scan_failed"


class AuditLogger:
    """审计日志记录器，每个事件写一行JSON。"""

    def __init__(self, log_file: str = "logs/audit.log"):
        self.log_file = Path(log_file)
        self.scan_id = uuid.uuid4().hex[:12]

        # 创建日志目录
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        # 审计事件总是以INFO级别写入，与控制台日志级别无关
        self.logger = logging.getLogger("portprobe.audit")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # 文件处理器
        self._handler = logging.FileHandler(self.log_file, encoding="utf-8")
        self._handler.setLevel(logging.INFO)
        self._handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(self._handler)

    def log_event(
        self,
        event_type: AuditEventType,
        target: Optional[str] = None,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """记录审计事件。"""
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type.value,
            "scan_id": self.scan_id,
            "target": target,
            "result": result,
            "metadata": metadata or {}
        }
        self.logger.info(json.dumps(event, ensure_ascii=False))

    def log_scan_start(self, config: ScanConfig) -> None:
        """记录扫描开始。"""
        self.log_event(
            AuditEventType.SCAN_START,
            target=config.host,
            metadata={
                "port_count": len(config.ports),
                "timeout": config.timeout,
                "concurrency_limit": config.concurrency_limit,
                "collect_banner": config.collect_banner
            }
        )

    def log_port_open(self, host: str, outcome: ScanOutcome) -> None:
        """记录开放端口。"""
        self.log_event(
            AuditEventType.PORT_OPEN,
            target=host,
            result="open",
            metadata=outcome.to_dict()
        )

    def log_scan_complete(self, host: str, open_count: int) -> None:
        """记录扫描完成。"""
        self.log_event(
            AuditEventType.SCAN_COMPLETE,
            target=host,
            result="success",
            metadata={"open_count": open_count}
        )

    def log_scan_failed(self, host: str, reason: str) -> None:
        """记录扫描失败。"""
        self.log_event(
            AuditEventType.SCAN_FAILED,
            target=host,
            result="failure",
            metadata={"reason": reason}
        )

    def close(self) -> None:
        """关闭文件处理器。"""
        self.logger.removeHandler(self._handler)
        self._handler.close()
