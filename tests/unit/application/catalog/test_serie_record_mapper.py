import uuid
from datetime import UTC, datetime

from tcg_catalog.application.catalog.mappers.serie_record_mapper import (
    SerieRecordMapper,
    decode_expansions,
    encode_expansions,
)
from tcg_catalog.application.catalog.protocols.serie_repository import SerieRecord
from tcg_catalog.domain.catalog.entities import Expansion, Serie
from tcg_catalog.domain.common.value_objects.ids import SerieId


def _make_record(expansions: str | None) -> SerieRecord:
    return SerieRecord(
        id=uuid.uuid4(),
        code="SV",
        name="Scarlet & Violet",
        release_year=2023,
        image_url=None,
        expansions=expansions,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        updated_at=None,
    )


class TestExpansionCodec:
    def test_encode_keeps_order(self) -> None:
        """Test that expansion codes are joined in order."""
        assert encode_expansions([Expansion("B"), Expansion("A")]) == "B,A"

    def test_encode_empty(self) -> None:
        """Test that no expansions are stored as None."""
        assert encode_expansions([]) is None

    def test_decode_skips_blank_segments(self) -> None:
        """Test that empty and whitespace segments are dropped."""
        assert decode_expansions(" A ,, B,") == (Expansion("A"), Expansion("B"))

    def test_padded_code_survives_storage(self) -> None:
        """Test that a padded code reads back equal to the expansion that was stored."""
        expansions = (Expansion(" A "), Expansion("B "))

        assert decode_expansions(encode_expansions(expansions)) == expansions

    def test_decode_nothing(self) -> None:
        """Test that a missing or empty column yields no expansions."""
        assert decode_expansions(None) == ()
        assert decode_expansions("") == ()


class TestSerieRecordMapper:
    def test_round_trip_preserves_expansion_order(self) -> None:
        """Test that expansions [A, B] come back as [A, B]."""
        mapper = SerieRecordMapper()
        serie = Serie.create_with_id(
            id=SerieId(uuid.uuid4()),
            code="SV",
            name="Scarlet & Violet",
            release_year=2023,
            image_url="https://images.example/sv.png",
            expansions=[Expansion("A"), Expansion("B")],
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
            updated_at=datetime(2024, 2, 1, tzinfo=UTC),
        )

        restored = mapper.to_domain(mapper.to_record(serie))

        assert restored.expansion_codes == ["A", "B"]
        assert restored == serie

    def test_to_domain(self) -> None:
        """Test converting a stored record to a serie."""
        record = _make_record("SV01,SV02")

        serie = SerieRecordMapper().to_domain(record)

        assert serie.id == SerieId(record.id)
        assert serie.expansion_codes == ["SV01", "SV02"]
        assert serie.created_at == record.created_at

    def test_to_record_without_id(self) -> None:
        """Test that a new serie maps to a record without id."""
        record = SerieRecordMapper().to_record(
            Serie.create(code="SV", name="Scarlet & Violet", release_year=2023)
        )

        assert record.id is None
        assert record.expansions is None
