from __future__ import annotations

from pathlib import Path

from gedcom_tree.core.context import LayoutContext, LayoutResult
from gedcom_tree.core.exceptions import ParseExecutionError
from gedcom_tree.graph.graph_builder import MARRIAGE, PARENT_CHILD, build_graph
from gedcom_tree.graph.layout import LayoutEngine
from gedcom_tree.loader.record_builder import build_records
from gedcom_tree.loader.tokenizer import tokenize_text


class Pipeline:
    """
    Orchestrates read -> tokenize -> records -> graph -> generations -> layout.
    No parsing or layout logic lives here.
    """

    def __init__(self, context: LayoutContext):
        self.ctx = context
        self.log = context.logger

    # ---------------------------------------------------------
    # Stages
    # ---------------------------------------------------------
    def load_content(self) -> None:
        if self.ctx.content is not None:
            return
        if not self.ctx.input_path:
            self.ctx.content = ""
            return

        path = Path(self.ctx.input_path)
        if not path.is_file():
            raise FileNotFoundError(f"GEDCOM file not found: {path}")

        self.log.info(f"Reading GEDCOM: {path}")
        self.ctx.content = path.read_bytes()

    def build_document(self) -> None:
        tokens = list(tokenize_text(self.ctx.content or ""))
        self.ctx.document = build_records(tokens)

        self.ctx.stats["tokens"] = len(tokens)
        self.ctx.stats["individuals"] = len(self.ctx.document.individuals)
        self.ctx.stats["families"] = len(self.ctx.document.families)

    def build_graph(self) -> None:
        graph = build_graph(self.ctx.document)
        self.ctx.graph = graph

        self.ctx.stats["marriage_links"] = len(graph.links_of_type(MARRIAGE))
        self.ctx.stats["parent_child_links"] = len(graph.links_of_type(PARENT_CHILD))
        self.ctx.stats["dropped_references"] = len(graph.dropped_references)

    def layout(self) -> None:
        engine = LayoutEngine.from_config(self.ctx.config)
        self.ctx.generations = engine.run(self.ctx.graph)

        self.ctx.stats["generations"] = len(set(self.ctx.generations.values()))

    # ---------------------------------------------------------
    # Runner
    # ---------------------------------------------------------
    def run(self) -> LayoutResult:
        self.log.debug("Pipeline starting")

        self.load_content()

        try:
            self.build_document()
            self.build_graph()
            self.layout()
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc

        result = LayoutResult(
            document=self.ctx.document,
            graph=self.ctx.graph,
            generations=self.ctx.generations,
        )

        if self.ctx.output_path:
            from gedcom_tree.exporter import export_graph_json
            export_graph_json(result, self.ctx.output_path)

        self.log.debug(f"Pipeline completed: {self.ctx.stats}")
        return result
