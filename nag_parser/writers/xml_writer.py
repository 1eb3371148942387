"""
XML report writer.
"""

from pathlib import Path
import xml.etree.ElementTree as ET

from loguru import logger

from ..core.data_structures import Report


class XmlWriter:
    """Writer for XML output format."""

    def build(self, report: Report) -> ET.Element:
        """Build the ``<Report>`` element tree for a report."""
        root = ET.Element("Report")

        high, normal, low = report.priorities
        summary = ET.SubElement(root, "Summary")
        ET.SubElement(summary, "Total").text = str(len(report))
        ET.SubElement(summary, "High").text = str(high)
        ET.SubElement(summary, "Normal").text = str(normal)
        ET.SubElement(summary, "Low").text = str(low)

        issues_elem = ET.SubElement(root, "Issues")
        for issue in report:
            issue_elem = ET.SubElement(issues_elem, "Issue")
            for key, value in issue.to_dict().items():
                ET.SubElement(issue_elem, key).text = str(value)
        return root

    def write(self, report: Report, output_path: Path) -> None:
        """Write the report to an XML file."""
        tree = ET.ElementTree(self.build(report))
        tree.write(output_path, encoding="utf-8", xml_declaration=True)
        logger.info(f"XML report written to {output_path}")
