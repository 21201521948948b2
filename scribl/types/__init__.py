from scribl.types.values import (
    VOID,
    TRUE,
    FALSE,
    Block,
    Boolean,
    Function,
    Iterator,
    Number,
    RuntimeValue,
    String,
    Value,
    ValueKind,
    Void,
    make_block,
    make_boolean,
    make_function,
    make_iterator,
    make_number,
    make_string,
    make_void,
    values_equal,
)
from scribl.types.environment import Binding, Environment
