"""Per-move metrics logging to CSV."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """Writes one CSV row per logged step (e.g. one machine move)."""

    def __init__(self, log_dir: str = "data/logs"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.rows: List[Dict[str, Any]] = []

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.csv_path = os.path.join(log_dir, f"metrics_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_fieldnames = ["step"]
        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
        self.csv_writer.writeheader()

    def log(self, key: str, value: Any, step: Optional[int] = None) -> None:
        """Log a single metric value."""
        self.log_dict({key: value}, step=step)

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log several metrics as one row.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step number (defaults to the number of rows logged so far)
        """
        if step is None:
            step = len(self.rows)

        new_fields = [key for key in metrics_dict if key not in self.csv_fieldnames]
        row = {"step": step, **metrics_dict}
        self.rows.append(row)
        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))

        if new_fields:
            # Header changed: rewrite the whole file with the wider header.
            self.csv_fieldnames.extend(new_fields)
            self.csv_file.close()
            self.csv_file = open(self.csv_path, "w", newline="")
            self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
            self.csv_writer.writeheader()
            for past in self.rows:
                self.csv_writer.writerow({field: past.get(field) for field in self.csv_fieldnames})
        else:
            self.csv_writer.writerow({field: row.get(field) for field in self.csv_fieldnames})
        self.csv_file.flush()

    def get_metric(self, key: str) -> List[tuple]:
        """
        Get all logged values for a metric.

        Returns:
            List of (step, value) tuples
        """
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the CSV file."""
        if self.csv_file and not self.csv_file.closed:
            self.csv_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
