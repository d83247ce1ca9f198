import os
from datetime import datetime, timezone
from typing import Iterable, Optional

import yaml

from .errors import StorageUnavailableError

OUTPUT_DIR_NAME = 'Output_yaml'
OUTPUT_SUFFIX = '_output.yaml'
# DD_MM_YYYY_HH:MM:SS, UTC
STAMP_FORMAT = '%d_%m_%Y_%H:%M:%S'

JOINT_ANGLES_KEY = 'joint angles'
END_EFFECTOR_KEY = 'end effector position'


def output_path(root: str, now: Optional[datetime] = None) -> str:
    """Path of the log file under <root>/Output_yaml, named after the UTC time"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return os.path.join(root, OUTPUT_DIR_NAME, now.strftime(STAMP_FORMAT) + OUTPUT_SUFFIX)


def ensure_output_dir(path: str) -> None:
    """Create the directory holding path if it does not exist yet"""
    directory = os.path.dirname(path)
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise StorageUnavailableError(f'Cannot create output directory {directory}: {e}') from e


def serialize(records: Iterable) -> str:
    """Render log records as a YAML sequence of mappings.

    Each record needs joint_angles and end_effector_position attributes.
    Both values are written as flow-style sequences.
    """
    documents = [
        {
            JOINT_ANGLES_KEY: [float(a) for a in record.joint_angles],
            END_EFFECTOR_KEY: [float(p) for p in record.end_effector_position],
        }
        for record in records
    ]
    if not documents:
        return ''
    return yaml.safe_dump(documents, default_flow_style=None, sort_keys=False)


def write_log(path: str, text: str) -> None:
    """Replace the content of path with text"""
    try:
        with open(path, 'w') as fout:
            fout.write(text)
    except OSError as e:
        raise StorageUnavailableError(f'Cannot write {path}: {e}') from e
