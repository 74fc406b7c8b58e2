#!/usr/bin/env python3
"""
Command-line validator for workflow graph documents
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.runtime.workflow_info import WorkflowInfo, load_and_validate
from workflow_graph.depth import UNREACHABLE_DEPTH, shortest_depth
from workflow_graph.schema import ValidationReport
from workflow_graph.visualize import draw_with_legend

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

    # matplotlib font discovery is noisy at DEBUG
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def print_report(report: ValidationReport):
    """Print a human-readable validation summary"""
    if report.valid:
        print("✅ Workflow is valid")
    else:
        print("❌ Workflow is invalid")

    if report.errors:
        print(f"\n Errors ({len(report.errors)}):")
        for finding in report.errors:
            suffix = f" {finding.node_ids}" if finding.node_ids else ""
            print(f"   - {finding.message}{suffix}")

    if report.warnings:
        print(f"\n Warnings ({len(report.warnings)}):")
        for finding in report.warnings:
            suffix = f" {finding.node_ids}" if finding.node_ids else ""
            print(f"   - {finding.message}{suffix}")

    if report.parallel_groups:
        print(f"\n Parallel Execution Groups ({len(report.parallel_groups)}):")
        for idx, group in enumerate(report.parallel_groups, start=1):
            print(f"   {idx}. {', '.join(group)}")


def print_depths(info: WorkflowInfo, node_ids: List[str]):
    print("\n Node depths:")
    for node_id in node_ids:
        depth = shortest_depth(info.graph, node_id)
        shown = "unreachable" if depth == UNREACHABLE_DEPTH else str(depth)
        print(f"   {node_id}: {shown}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function"""
    parser = argparse.ArgumentParser(
        description="Validate a workflow graph document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Human-readable report
  workflow-validate config/sample_workflow.json

  # Machine-readable report
  workflow-validate config/sample_workflow.json --json

  # Depths and a rendered graph
  workflow-validate config/sample_workflow.json --depth review --visualize workflow.png
        """
    )

    parser.add_argument('path', help='Path to workflow JSON document')
    parser.add_argument('--json', action='store_true', help='Print the report as JSON')
    parser.add_argument(
        '--depth',
        action='append',
        default=[],
        metavar='NODE_ID',
        help='Print the depth of a node from the entry node (repeatable)'
    )
    parser.add_argument('--visualize', metavar='PNG', help='Render the graph with parallel groups to PNG')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--log-file', help='Also write logs to this file')

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        info = load_and_validate(args.path)
    except ValueError as e:
        print(f"❌ Could not load workflow: {e}")
        return EXIT_LOAD_FAILED

    if args.json:
        payload = info.report.to_dict()
        if args.depth:
            payload["depths"] = {n: shortest_depth(info.graph, n) for n in args.depth}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(f"Workflow: {info.document.name} ({len(info.document.nodes)} nodes, {len(info.document.edges)} edges)")
        print_report(info.report)
        orphans = info.document.orphan_reducers()
        if orphans:
            print(f"\n Note: reducers without a matching state field: {', '.join(orphans)}")
        if args.depth:
            print_depths(info, args.depth)

    if args.visualize:
        if draw_with_legend(info.graph, args.visualize, groups=info.report.parallel_groups):
            print(f"\n✅ Graph rendered: {args.visualize}")
        else:
            logger.warning("Rendering skipped")

    return EXIT_VALID if info.report.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
