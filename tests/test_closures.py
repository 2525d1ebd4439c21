import pytest

from zeus.interpreter import Interpreter
from zeus.types.errors import ZeusStackDepthExceeded


MAKE_ADDER = """
(define make-adder (lambda (n) (lambda (x) (+ x n))))
(define add5 (make-adder 5))
"""


def test_closure_captures_defining_scope(itp):
    itp.eval(MAKE_ADDER)
    assert itp.eval("(add5 3)") == 8


def test_closure_ignores_later_global_rebinding(itp):
    itp.eval(MAKE_ADDER)
    itp.eval("(define n 100)")
    assert itp.eval("(add5 3)") == 8


def test_closures_do_not_share_bindings(itp):
    itp.eval(MAKE_ADDER)
    itp.eval("(define add10 (make-adder 10))")
    assert itp.eval("(list (add5 1) (add10 1))") == [6, 11]


def test_counter_closure_keeps_private_state(itp):
    itp.eval("""
    (defun make-counter ()
      (let ((count 0))
        (lambda () (set! count (+ count 1)) count)))
    (define c1 (make-counter))
    (define c2 (make-counter))
    (c1) (c1)
    """)
    assert itp.eval("(c1)") == 3
    assert itp.eval("(c2)") == 1


def test_lexical_not_dynamic_scope(itp):
    itp.eval("""
    (define y 1)
    (defun get-y () y)
    (defun shadow-y (y) (get-y))
    """)
    assert itp.eval("(shadow-y 99)") == 1


def test_closures_over_do_loop_variables_are_per_iteration(itp):
    itp.eval("""
    (define fns '())
    (do ((i 0 (+ i 1))) ((= i 3))
      (set! fns (cons (lambda () i) fns)))
    """)
    assert itp.eval("(mapcar funcall fns)") == [2, 1, 0]


@pytest.mark.parametrize("n,expected", [(0, 1), (5, 120), (10, 3628800)])
def test_recursive_factorial(itp, n, expected):
    itp.eval("(defun factorial (n) (if (<= n 1) 1 (* n (factorial (- n 1)))))")
    assert itp.eval(f"(factorial {n})") == expected


# ------------------ Tail calls ------------------

def test_tail_recursive_loop_runs_in_constant_stack(itp):
    """A self tail call 100000 deep must not exhaust the host stack."""
    itp.eval("""
    (defun count-down (n acc)
      (if (= n 0)
          acc
          (count-down (- n 1) (+ acc 1))))
    """)
    assert itp.eval("(count-down 100000 0)") == 100000


def test_mutual_tail_calls_through_cond(itp):
    itp.eval("""
    (defun my-even? (n) (cond ((= n 0) t) (else (my-odd? (- n 1)))))
    (defun my-odd? (n) (cond ((= n 0) nil) (else (my-even? (- n 1)))))
    """)
    assert itp.eval("(my-even? 50001)") == []


def test_tail_calls_through_let_when_and_or(itp):
    itp.eval("""
    (defun spin (n)
      (let ((m (- n 1)))
        (when (> n 0)
          (or nil (and t (spin m))))))
    """)
    assert itp.eval("(spin 50000)") == []


def test_tail_call_inside_do_exit_expression(itp):
    itp.eval("(defun loop-to (n) (do ((i 0 (+ i 1))) ((= i 1) (if (= n 0) 'done (loop-to (- n 1))))))")
    assert itp.eval("(loop-to 20000)") == itp.eval("'done")


def test_deep_non_tail_recursion_is_reported():
    itp = Interpreter()
    itp.eval("(defun depth (n) (if (= n 0) 0 (+ 1 (depth (- n 1)))))")
    with pytest.raises(ZeusStackDepthExceeded):
        itp.eval("(depth 1000000)")
    # The instance stays usable afterwards
    assert itp.eval("(depth 10)") == 10
    assert itp.env.runtime.depth == 0


def test_configured_depth_bound():
    itp = Interpreter(max_depth=200)
    itp.eval("(defun depth (n) (if (= n 0) 0 (+ 1 (depth (- n 1)))))")
    assert itp.eval("(depth 5)") == 5
    with pytest.raises(ZeusStackDepthExceeded):
        itp.eval("(depth 500)")


def test_depth_bound_does_not_limit_tail_calls():
    itp = Interpreter(max_depth=200)
    itp.eval("(defun spin (n) (if (= n 0) 'ok (spin (- n 1))))")
    assert itp.eval("(spin 10000)") == itp.eval("'ok")
