"""
Unit tests for annotation and mutation readers
"""
import json

import pytest
from Bio.Seq import Seq
from Bio.SeqFeature import FeatureLocation, SeqFeature
from Bio.SeqRecord import SeqRecord

from lollyplot.data import EXAMPLE_TP53_GRAPHIC
from lollyplot.io import GraphicReader, UniProtReader, read_mutations
from lollyplot.io import readers


class TestGraphicReaderJson:
    """Tests for GraphicReader.from_json"""

    def test_bundled_tp53(self):
        graphic = GraphicReader.from_json(EXAMPLE_TP53_GRAPHIC)
        assert graphic.length == 393
        assert graphic.identifier == "P53_HUMAN"
        assert [r.text for r in graphic.regions] == ["P53_TAD", "P53", "P53_tetramer"]
        assert graphic.regions[0].start == 6
        assert graphic.regions[0].end == 30
        assert graphic.regions[0].size == 24
        assert graphic.regions[0].link == "/family/PF08563"
        assert graphic.regions[1].description == "P53 DNA-binding domain"
        assert len(graphic.motifs) == 5
        assert sum(m.is_disordered for m in graphic.motifs) == 3

    def test_single_record(self, tmp_path):
        """A bare record is accepted as well as a list"""
        path = tmp_path / "graphic.json"
        path.write_text(json.dumps({
            "length": 120,
            "regions": [{"start": 10, "end": 50, "color": "#AA0000", "text": "Kinase"}],
        }))
        graphic = GraphicReader.from_json(path)
        assert graphic.length == 120
        assert graphic.regions[0].color == "#aa0000"
        assert graphic.motifs == []

    def test_missing_color_uses_palette(self):
        graphic = GraphicReader.from_record({
            "length": "100",
            "regions": [{"start": "1", "end": "20", "text": "A"}],
        })
        assert graphic.regions[0].color.startswith("#")

    def test_missing_length_raises(self):
        with pytest.raises(ValueError):
            GraphicReader.from_record({"regions": []})

    def test_empty_list_raises(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        with pytest.raises(ValueError):
            GraphicReader.from_json(path)


class TestGraphicReaderTable:
    """Tests for GraphicReader.from_table"""

    def test_regions_and_motifs(self, tmp_path):
        path = tmp_path / "features.tsv"
        path.write_text(
            "start\tend\tlabel\tcolor\tkind\n"
            "10\t40\tKinase\t#FF0000\tregion\n"
            "50\t60\tTM\t#00ff00\ttransmembrane\n"
            "70\t90\tdis\t#cccccc\tdisorder\n"
        )
        graphic = GraphicReader.from_table(path, length=120, identifier="TEST")
        assert graphic.length == 120
        assert graphic.identifier == "TEST"
        assert len(graphic.regions) == 1
        assert graphic.regions[0].text == "Kinase"
        assert graphic.regions[0].color == "#ff0000"
        assert [m.type for m in graphic.motifs] == ["transmembrane", "disorder"]
        assert graphic.motifs[1].is_disordered

    def test_text_column_alias(self, tmp_path):
        path = tmp_path / "features.csv"
        path.write_text("start,end,text\n5,25,SH2\n")
        graphic = GraphicReader.from_table(path, length=50)
        assert graphic.regions[0].text == "SH2"
        assert graphic.regions[0].color.startswith("#")

    def test_missing_columns_raise(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("from,to,label\n5,25,SH2\n")
        with pytest.raises(ValueError, match="start"):
            GraphicReader.from_table(path, length=50)


class TestUniProtReader:
    """Tests for UniProtReader.load with a stubbed Bio.SeqIO.parse"""

    @pytest.fixture
    def uniprot_record(self):
        record = SeqRecord(Seq("M" * 60), id="P99999", name="TEST_HUMAN",
                           description="Test protein")
        record.features = [
            SeqFeature(FeatureLocation(0, 60), type="CHAIN", qualifiers={"note": "Test protein"}),
            SeqFeature(FeatureLocation(4, 20), type="DOMAIN", qualifiers={"note": "Kinase"}),
            SeqFeature(FeatureLocation(29, 45), type="TRANSMEM", qualifiers={"note": "Helical"}),
            SeqFeature(FeatureLocation(49, 60), type="REGION", qualifiers={"note": "Disordered"}),
            SeqFeature(FeatureLocation(0, 3), type="REGION", qualifiers={"note": "Interaction with X"}),
        ]
        return record

    def test_load(self, monkeypatch, tmp_path, uniprot_record):
        monkeypatch.setattr(readers.SeqIO, "parse", lambda handle, fmt: iter([uniprot_record]))
        graphic = UniProtReader.load(tmp_path / "entry.txt")

        assert graphic.length == 60
        assert graphic.identifier == "TEST_HUMAN"
        assert len(graphic.regions) == 1
        region = graphic.regions[0]
        assert (region.start, region.end, region.text) == (5, 20, "Kinase")
        assert [(m.type, m.start, m.end) for m in graphic.motifs] == [
            ("transmembrane", 30, 45),
            ("disorder", 50, 60),
        ]

    def test_no_records_raise(self, monkeypatch, tmp_path):
        monkeypatch.setattr(readers.SeqIO, "parse", lambda handle, fmt: iter([]))
        with pytest.raises(ValueError):
            UniProtReader.load(tmp_path / "entry.txt")


class TestReadMutations:
    """Tests for read_mutations"""

    def test_plain_list(self, tmp_path):
        path = tmp_path / "mutations.txt"
        path.write_text("R273C\n\n# hotspot\nR175H@3\n  G245S  \n")
        assert read_mutations(path) == ["R273C", "R175H@3", "G245S"]

    def test_table_with_counts(self, tmp_path):
        path = tmp_path / "mutations.tsv"
        path.write_text("change\tcount\nR273C\t3\nG245S\t1\n")
        assert read_mutations(path) == ["R273C@3", "G245S@1"]

    def test_table_keeps_explicit_count(self, tmp_path):
        path = tmp_path / "mutations.csv"
        path.write_text("change,count\nR273C@2,5\n")
        assert read_mutations(path) == ["R273C@2"]

    def test_single_column_table(self, tmp_path):
        """A lone 'change' header is a table header, not a change"""
        path = tmp_path / "mutations.tsv"
        path.write_text("change\nR273C\nG245S@2\n")
        assert read_mutations(path) == ["R273C", "G245S@2"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("# nothing\n\n")
        assert read_mutations(path) == []
