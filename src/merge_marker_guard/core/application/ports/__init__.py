from merge_marker_guard.core.application.ports.file_content_port import FileContentPort
from merge_marker_guard.core.application.ports.output_port import OutputPort
from merge_marker_guard.core.application.ports.pull_request_port import PullRequestPort

__all__ = ["FileContentPort", "OutputPort", "PullRequestPort"]
