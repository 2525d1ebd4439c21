import pytest

from zeus.types.builtin_fn import Builtin
from zeus.types.errors import (
    ZeusArityError,
    ZeusDivisionByZero,
    ZeusNotAProcedure,
    ZeusTypeError,
)
from zeus.types.symbol import Keyword, Symbol
from zeus.types.values import T


# ------------------ Arithmetic ------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(- 10 4 1)", 5),
        ("(- 5)", -5),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(/ 12 3 2)", 2),
        ("(/ 4)", 0.25),
        ("(/ 1 2)", 0.5),
        ("(mod 7 3)", 1),
        ("(mod -7 3)", 2),
        ("(+ 0.5 0.25)", 0.75),
    ],
)
def test_arithmetic(run, code, expected):
    assert run(code) == expected


def test_arithmetic_results_are_floats(run):
    assert isinstance(run("(+ 1 2)"), float)
    assert isinstance(run("(length '(1 2))"), float)


@pytest.mark.parametrize("code", ["(+ 1 'a)", '(* 2 "3")', "(- nil)", "(< 1 :k)"])
def test_arithmetic_type_errors(run, code):
    with pytest.raises(ZeusTypeError):
        run(code)


@pytest.mark.parametrize("code", ["(/ 1 0)", "(/ 0)", "(/ 5 1 0)", "(mod 3 0)"])
def test_division_by_zero(run, code):
    with pytest.raises(ZeusDivisionByZero):
        run(code)


@pytest.mark.parametrize("code", ["(-)", "(/)", "(mod 1)", "(not)", "(=)"])
def test_arithmetic_arity(run, code):
    with pytest.raises(ZeusArityError):
        run(code)


# ------------------ Comparison ------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", []),
        ("(> 3 2 1)", T),
        ("(<= 1 1 2)", T),
        ("(>= 2 2 3)", []),
        ("(= 1 1.0)", T),
        ("(= 1 2)", []),
        ("(= '(1 (2)) '(1 (2)))", T),
        ('(= "a" "a")', T),
        ("(= 'a 'a)", T),
        ("(= 'a \"a\")", []),
        ("(equal '(a) '(a))", T),
        ("(/= 1 2)", T),
        ("(/= 1 1)", []),
        ("(not nil)", T),
        ("(not 0)", []),
    ],
)
def test_comparison(run, code, expected):
    assert run(code) == expected


# ------------------ Lists ------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        ("(list 1 2 3)", [1, 2, 3]),
        ("(list)", []),
        ("(car '(1 2 3))", 1),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(cdr '(1))", []),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(cons 1 nil)", [1]),
        ("(append '(1) '() '(2 3))", [1, 2, 3]),
        ("(append)", []),
        ("(reverse '(1 2 3))", [3, 2, 1]),
        ("(length '(1 2 3))", 3),
        ('(length "abcd")', 4),
        ("(nth 1 '(a b c))", Symbol("b")),
        ("(nthcdr 1 '(a b c))", [Symbol("b"), Symbol("c")]),
        ("(nthcdr 3 '(a b c))", []),
        ("(member 2 '(1 2 3))", [2, 3]),
        ("(member 9 '(1 2 3))", []),
        ("(member '(b) '(a (b) c))", [[Symbol("b")], Symbol("c")]),
    ],
)
def test_list_operations(run, code, expected):
    assert run(code) == expected


@pytest.mark.parametrize(
    "code",
    [
        "(car (list))",
        "(cdr nil)",
        "(car 5)",
        "(cons 1 2)",
        "(append '(1) 2)",
        "(nth 3 '(a b c))",
        "(nth -1 '(a b c))",
        "(nth 0.5 '(a b c))",
        "(nthcdr 4 '(a b c))",
        "(length 5)",
    ],
)
def test_list_type_errors(run, code):
    with pytest.raises(ZeusTypeError):
        run(code)


BIG = "1" + "0" * 300
INF = f"(* {BIG} {BIG})"


@pytest.mark.parametrize("fn", ["nth", "nthcdr"])
@pytest.mark.parametrize("index", [INF, f"(- {INF} {INF})"], ids=["inf", "nan"])
def test_non_finite_index_is_a_type_error(run, fn, index):
    with pytest.raises(ZeusTypeError):
        run(f"({fn} {index} '(1 2))")


def test_cons_does_not_mutate_its_tail(run):
    run("(define xs '(2 3))")
    run("(define ys (cons 1 xs))")
    assert run("xs") == [2, 3]
    assert run("ys") == [1, 2, 3]


# ------------------ Higher-order ------------------

def test_mapcar_square(run):
    assert run("(mapcar (lambda (x) (* x x)) '(1 2 3 4 5))") == [1, 4, 9, 16, 25]


def test_mapcar_multiple_lists_stops_at_shortest(run):
    assert run("(mapcar + '(1 2 3) '(10 20))") == [11, 22]


def test_filter_and_remove(run):
    assert run("(filter (lambda (x) (> x 2)) '(1 2 3 4 5))") == [3, 4, 5]
    assert run("(remove (lambda (x) (> x 2)) '(1 2 3 4 5))") == [1, 2]


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(reduce + (list 1 2 3 4 5))", 15),
        ("(reduce + '(7))", 7),
        ("(reduce + '() 0)", 0),
        ("(reduce (lambda (acc x) (cons x acc)) '(1 2 3) '())", [3, 2, 1]),
        ("(reduce - '(10 1 2))", 7),
    ],
)
def test_reduce(run, code, expected):
    assert run(code) == expected


def test_reduce_empty_without_init(run):
    with pytest.raises(ZeusArityError):
        run("(reduce + '())")


def test_apply_and_funcall(run):
    assert run("(apply + '(1 2 3))") == 6
    assert run("(funcall (lambda (a b) (* a b)) 6 7)") == 42
    assert run("(funcall list)") == []


def test_higher_order_callbacks_run_in_list_order(run):
    run("(define order '())")
    run("(mapcar (lambda (x) (set! order (cons x order))) '(1 2 3))")
    assert run("order") == [3, 2, 1]


def test_higher_order_with_non_procedure(run):
    with pytest.raises(ZeusNotAProcedure):
        run("(mapcar 5 '(1 2))")


def test_callback_arity_errors_propagate(run):
    with pytest.raises(ZeusArityError):
        run("(mapcar (lambda (a b) a) '(1 2))")


def test_higher_order_deep_tail_recursion_in_callback(run):
    run("(defun spin (n) (if (= n 0) 'done (spin (- n 1))))")
    assert run("(mapcar spin '(5000 10))") == [Symbol("done"), Symbol("done")]


# ------------------ Predicates and conversions ------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        ("(null? nil)", T),
        ("(null? '(1))", []),
        ("(atom? 1)", T),
        ("(atom? nil)", T),
        ("(atom? '(1))", []),
        ("(list? nil)", T),
        ("(list? 'a)", []),
        ("(number? 1.5)", T),
        ('(number? "1")', []),
        ('(string? "s")', T),
        ("(symbol? 'a)", T),
        ("(symbol? :a)", []),
        ("(symbol? (gensym))", T),
        ("(keyword? :a)", T),
        ("(procedure? car)", T),
        ("(procedure? (lambda () 1))", T),
        ("(procedure? 'car)", []),
    ],
)
def test_predicates(run, code, expected):
    assert run(code) == expected


def test_symbol_string_conversions(run):
    assert run("(symbol->string 'abc)") == "abc"
    assert run('(string->symbol "abc")') == Symbol("abc")
    assert run("(= (string->symbol \"x\") 'x)") == T
    with pytest.raises(ZeusTypeError):
        run('(symbol->string "abc")')
    with pytest.raises(ZeusTypeError):
        run("(string->symbol 'abc)")


# ------------------ Output ------------------

def test_print_writes_without_newline(run, capsys):
    assert run('(print "a" 1 \'b)') == Symbol("b")
    assert capsys.readouterr().out == "a1b"


def test_println_writes_each_argument_on_a_line(run, capsys):
    assert run("(println \"x\" '(1 \"s\") :k)") == Keyword("k")
    assert capsys.readouterr().out == 'x\n(1 "s")\n:k\n'


def test_print_with_no_arguments_returns_nil(run, capsys):
    assert run("(println)") == []
    assert capsys.readouterr().out == ""


# ------------------ Environment setup ------------------

def test_builtins_are_bound_as_values(env, run):
    car = run("car")
    assert isinstance(car, Builtin)
    assert repr(car) == "#<builtin car>"
    assert run("t") == T


def test_builtins_can_be_shadowed_locally(run):
    assert run("(let ((car (lambda (x) 'mine))) (car '(1)))") == Symbol("mine")
    assert run("(car '(1))") == 1
