from matrixadapter.io.inputs import InputSource, ConsoleInput, ScriptedInput, parse_float, read_float

__all__ = ["InputSource", "ConsoleInput", "ScriptedInput", "parse_float", "read_float"]
