from ..model import Outcome
from ..runners.runner import RunResult
import xml.etree.ElementTree as ET
class JUnitReporter:
    def __init__(self, path: str): self.path = path
    def emit(self, result: RunResult) -> None:
        testsuite = ET.Element("testsuite", name=result.suite, tests=str(result.summary.total),
                               failures=str(result.failed), skipped=str(result.skipped), errors="0")
        for c in result.cases:
            tc = ET.SubElement(testsuite, "testcase", name=c.name, classname=result.suite)
            if c.outcome is Outcome.FAIL:
                failure = ET.SubElement(tc, "failure", message=c.detail)
                failure.text = c.detail
            elif c.outcome is Outcome.SKIP:
                ET.SubElement(tc, "skipped", message=c.detail)
        ET.ElementTree(testsuite).write(self.path, encoding="utf-8", xml_declaration=True)
