"""Serialization of classification results and Brand Guide selections."""

from .report import descriptor_to_dict, result_to_dict, selection_to_dict, write_report_json

__all__ = ["descriptor_to_dict", "result_to_dict", "selection_to_dict", "write_report_json"]
