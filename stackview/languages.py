"""Keyword and type vocabularies used by the syntax highlighter."""

from __future__ import annotations

import enum


class SyntaxHighlight(enum.Enum):
    """The kind of token a word is highlighted as."""

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    FUNCTION = "function"
    NUMBER = "number"
    TYPE = "type"
    ATTRIBUTE = "attribute"
    NONE = "none"


_RUST_KEYWORDS = """
    as async await break const continue crate dyn else enum extern false fn for
    if impl in let loop match mod move mut pub ref return self Self static
    struct super trait true type unsafe use where
""".split()

_PYTHON_KEYWORDS = """
    def class if elif else while for in return import from as try except
    finally raise with lambda True False None and or not
""".split()

_JAVASCRIPT_KEYWORDS = """
    const let var function async await if else for while do switch case break
    continue return try catch finally throw new class extends import export
    from default typeof instanceof this true false null undefined
""".split()

_GO_KEYWORDS = """
    package import func var const type struct interface map chan if else for
    range switch case default break continue return go defer select true
    false nil
""".split()

_JAVA_KEYWORDS = """
    public private protected static final abstract class interface enum
    extends implements new this super if else for while do switch case
    default break continue return throw throws try catch finally import
    package void int long double float boolean char byte short true false null
""".split()

_C_KEYWORDS = """
    int char void float double long short unsigned signed const static extern
    volatile sizeof typedef struct union enum if else for while do switch case
    default break continue return goto include define ifdef ifndef endif NULL
""".split()

_CSHARP_KEYWORDS = """
    using namespace class struct interface enum public private protected
    internal static readonly const new virtual override abstract sealed
    partial void int long double float bool string var if else for foreach
    while do switch case default break continue return try catch finally
    throw true false null
""".split()

_SWIFT_KEYWORDS = """
    import class struct enum protocol extension func var let static public
    private internal open final override mutating nonmutating lazy if else
    guard switch case default for while repeat break continue return throw
    throws try catch init deinit self Self nil true false
""".split()

_KOTLIN_KEYWORDS = """
    package import class object interface data sealed enum annotation fun val
    var const lateinit by companion open abstract final override private
    protected public internal suspend inline reified noinline crossinline out
    in where if else when for while do return break continue throw try catch
    finally this null true false is as as?
""".split()

_KEYWORDS: dict[str, list[str]] = {
    "rust": _RUST_KEYWORDS,
    "python": _PYTHON_KEYWORDS,
    "ruby": _PYTHON_KEYWORDS,
    "javascript": _JAVASCRIPT_KEYWORDS,
    "typescript": _JAVASCRIPT_KEYWORDS,
    "go": _GO_KEYWORDS,
    "java": _JAVA_KEYWORDS,
    "c": _C_KEYWORDS,
    "cpp": _C_KEYWORDS,
    "csharp": _CSHARP_KEYWORDS,
    "swift": _SWIFT_KEYWORDS,
    "kotlin": _KOTLIN_KEYWORDS,
}

_RUST_TYPES = """
    String Vec Option Result Box Rc Arc Cell RefCell Cow HashMap HashSet
    BTreeMap BTreeSet LinkedList VecDeque BinaryHeap i8 i16 i32 i64 i128 u8
    u16 u32 u64 u128 usize isize f32 f64 bool char str Path PathBuf OsString
    CString Duration SystemTime
""".split()

_PYTHON_TYPES = """
    int float str bool list dict tuple set bytes bytearray range memoryview
    type object Exception
""".split()

_JAVASCRIPT_TYPES = """
    string number boolean undefined null symbol bigint any void never unknown
    object Array Promise Map Set WeakMap WeakSet
""".split()

_GO_TYPES = """
    string int int8 int16 int32 int64 uint uint8 uint16 uint32 uint64 uintptr
    float32 float64 complex64 complex128 bool byte rune error interface struct
    chan map func
""".split()

_JAVA_TYPES = """
    String Integer int Long long Double double Float float Boolean boolean
    Character char Byte byte Short short Object List ArrayList Map HashMap Set
    HashSet Collection Iterator Exception
""".split()

_C_TYPES = "FILE size_t ssize_t intptr_t uintptr_t bool wchar_t".split()

_TYPES: dict[str, list[str]] = {
    "rust": _RUST_TYPES,
    "python": _PYTHON_TYPES,
    "ruby": _PYTHON_TYPES,
    "javascript": _JAVASCRIPT_TYPES,
    "typescript": _JAVASCRIPT_TYPES,
    "go": _GO_TYPES,
    "java": _JAVA_TYPES,
    "csharp": _JAVA_TYPES,
    "c": _C_TYPES,
    "cpp": _C_TYPES,
}


def keywords(language: str) -> dict[str, SyntaxHighlight]:
    """The keywords of a language; empty for languages without a list."""
    return dict.fromkeys(_KEYWORDS.get(language, ()), SyntaxHighlight.KEYWORD)


def types(language: str) -> dict[str, SyntaxHighlight]:
    """The built-in type names of a language; empty for languages without a list."""
    return dict.fromkeys(_TYPES.get(language, ()), SyntaxHighlight.TYPE)