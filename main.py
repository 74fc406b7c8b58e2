from __future__ import annotations

import os
from workflow_graph.graph_builder import WorkflowGraphBuilder


def main() -> None:
    print("=" * 60)
    print("WorkflowGraphBuilder demo")
    print("=" * 60)

    base_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(base_dir, 'config', 'sample_workflow.json')
    output_png = os.path.join(base_dir, 'workflow_graph.png')

    builder = WorkflowGraphBuilder()

    # load the workflow document
    if not builder.load_from_json(config_path):
        return

    # build and validate
    valid = builder.build_graph()
    print(f"\nValid: {valid}")
    for finding in builder.report.errors + builder.report.warnings:
        print(f" - [{finding.severity}] {finding.message} {finding.node_ids or ''}")

    cycle_result = builder.detect_cycles()
    if cycle_result["success"]:
        print("\n✅ No cycles")
    else:
        print(f"\n❌ Cycles: {cycle_result['cycles']}")

    graph_info = builder.export_graph_info()
    print(f"\nNodes: {graph_info['graph_stats']['nodes']}")
    print(f"Edges: {graph_info['graph_stats']['edges']}")
    print(f"Parallel groups: {graph_info['parallel_groups']}")
    for node in builder.graph.nodes():
        print(f"  depth({node}) = {builder.node_depth(node)}")

    if builder.visualize_graph(output_png):
        print(f"\n✅ Graph rendered: {output_png}")
    else:
        print("\n⚠️ Rendering skipped")


if __name__ == "__main__":
    main()
