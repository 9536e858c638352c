"""
Core — iteration primitives и value objects.

Содержит явный контракт SequenceProducer/Cursor, NumericRange, lazy_map,
утилиты последовательностей и JSON Schema контракты. Core ничего не логирует.
"""
