from schemer.interpreter import Interpreter

MEMBER = """
;; another comment
(define member?
  (lambda (a lat)
    (cond
      ((null? lat) #f)
      ((eq? (car lat) a)
        #t)
      (else
        (member? a (cdr lat))))))
"""


def test_ands():
    itp = Interpreter()
    itp.eval(MEMBER + """
    ;; some comment
    (define is-rock-band?
      (lambda (band-name)
        (and (member? (quote a) band-name)
             (member? (quote c) band-name)
             (member? (quote d) band-name))))
    """)

    assert itp.eval("(is-rock-band? (quote (a c d c)))") is True
    assert itp.eval("(is-rock-band? (quote (a b b a)))") is False


def test_ors():
    itp = Interpreter()
    itp.eval(MEMBER + """
    ;; yet another comment
    (define has-cool-resume?
      (lambda (resume) ;; some in-line comment
        (or (member? (quote elixir) resume)
            (member? (quote ocaml) resume)
            (member? (quote scheme) resume))))
    """)

    assert itp.eval("(has-cool-resume? (quote (java javascript ocaml ruby)))") is True
    assert itp.eval("(has-cool-resume? (quote (tps-reports synergy)))") is False


def test_nots():
    itp = Interpreter()
    itp.eval("""
    (define is-not-elephant?
      (lambda (x)
        (not (eq? x (quote elephant)))))
    """)

    assert itp.eval("(is-not-elephant? (quote elephant))") is False
    assert itp.eval("(is-not-elephant? (quote laptop))") is True


def test_quote_shorthand_and_nested_lists():
    itp = Interpreter()
    itp.eval(MEMBER)
    assert itp.eval("(member? '(b) '(a (b) c))") is True
    assert itp.eval("(car (cdr '((a b) (c d))))") == itp.eval("'(c d)")


def test_separate_interpreters_have_separate_stores():
    first = Interpreter()
    second = Interpreter()
    first.eval("(define only-here 1)")
    assert first.eval("only-here") == 1
    assert "only-here" not in {str(n) for n in second.store.names()}


def test_strings_evaluate_to_themselves_and_display(out):
    itp = Interpreter(out=out)
    assert itp.eval('"plain"') == "plain"
    itp.eval(r'(display "line one\nline two")')
    assert out.getvalue() == "line one\nline two"
