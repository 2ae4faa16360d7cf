from novalang.codegen import generate_assembly, write_assembly
from novalang.ir import IRInstruction

EMPTY = ".global main\n.text\nmain:\n    mov $0, %rax\n    ret\n"


def test_empty_program():
    assert generate_assembly([]) == EMPTY


def test_load_const():
    asm = generate_assembly([IRInstruction("load_const", "5", "", "t0")])
    assert "    mov $5, %t0\n" in asm


def test_add_sequence():
    asm = generate_assembly([IRInstruction("add", "t0", "t1", "t2")])
    assert "    mov %t0, %rax\n    add %t1, %rax\n    mov %rax, %t2\n" in asm


def test_mul_uses_imul():
    asm = generate_assembly([IRInstruction("mul", "a", "b", "c")])
    assert "    imul %b, %rax\n" in asm
    assert "    mov %rax, %c\n" in asm


def test_store():
    asm = generate_assembly([IRInstruction("store", "t0", "", "x")])
    assert "    mov %t0, %x\n" in asm


def test_print_calls_runtime():
    asm = generate_assembly([IRInstruction("print", "x")])
    assert "    mov %x, %rdi\n    call print_int\n" in asm


def test_unknown_op_is_ignored():
    assert generate_assembly([IRInstruction("nop", "a", "b", "c")]) == EMPTY


def test_framing_wraps_body():
    asm = generate_assembly([IRInstruction("print", "x")])
    assert asm.startswith(".global main\n.text\nmain:\n")
    assert asm.endswith("    mov $0, %rax\n    ret\n")


def test_write_assembly_matches_generated(tmp_path):
    ir = [IRInstruction("load_const", "1", "", "t0"), IRInstruction("print", "t0")]
    target = tmp_path / "out.s"
    write_assembly(ir, target)
    assert target.read_text(encoding="utf-8") == generate_assembly(ir)