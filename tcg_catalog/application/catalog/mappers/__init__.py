from .serie_record_mapper import SerieRecordMapper, decode_expansions, encode_expansions

__all__ = [
    "SerieRecordMapper",
    "decode_expansions",
    "encode_expansions",
]
