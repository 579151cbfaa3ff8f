"""
Shared fixtures: fixed-width CNAB 240 record builders
"""
import pytest

FILE_HEADER = f"{'34100000         212345678000195':<240}"
BATCH_HEADER = f"{'34100011R01  030  2012345678000195':<240}"
BATCH_TRAILER = f"{'34100015         000014':<240}"
FILE_TRAILER = f"{'34199999         000001000016':<240}"


def make_record(
    segment: str = "Q",
    company: str = "",
    street: str = "",
    district: str = "",
    zip_code: str = "",
    state: str = "",
    acronym: str = "",
    seq: int = 1,
    inscription: str = "002334567000118",
) -> str:
    """Build a 240-column detail record with the Segmento Q address layout"""
    # bank 341, batch 0001, record type 3, sequence
    line = f"34100013{seq:05d}{segment} 012{inscription:<15.15}"
    line += (
        f"{company:<40.40}{street:<40.40}{district:<15.15}"
        f"{zip_code:<8.8}{state:<15.15}{acronym:<2.2}"
    )
    return f"{line:<240}"


def make_document(records: list[str]) -> str:
    """Wrap records with two header and two trailer lines"""
    return "\n".join([FILE_HEADER, BATCH_HEADER, *records, BATCH_TRAILER, FILE_TRAILER])


@pytest.fixture
def ntt_record() -> str:
    return make_record(
        segment="Q",
        company="NTT BRASIL COMERCIO E SERVICOS DE TECNOL",
        street="AV DOUTOR CHUCRI ZAIDAN 1240 ANDAR 5",
        district="VILA SAO FRANCI",
        zip_code="04711130",
        state="SAO PAULO",
        acronym="SP",
        seq=2,
    )


@pytest.fixture
def records(ntt_record) -> list[str]:
    return [
        make_record(segment="P", seq=1),
        ntt_record,
        make_record(segment="R", seq=3),
        make_record(segment="P", seq=4),
        make_record(
            segment="Q",
            company="MERCADO GAMA EIRELI",
            street="RUA DAS FLORES 77",
            district="CENTRO",
            zip_code="80010000",
            state="CURITIBA",
            acronym="PR",
            seq=5,
        ),
        make_record(segment="R", seq=6),
    ]


@pytest.fixture
def cnab_file(tmp_path, records):
    path = tmp_path / "remessa.rem"
    path.write_text(make_document(records), encoding="utf-8")
    return path


@pytest.fixture
def latin1_file(tmp_path):
    """Remessa written as ISO-8859-1, with accented company and street names"""
    record = make_record(
        company="CONSTRUÇÕES NTT LTDA",
        street="PRAÇA DA SÉ 100",
        district="SÉ",
        state="SÃO PAULO",
        acronym="SP",
        seq=2,
    )
    path = tmp_path / "remessa-latin1.rem"
    path.write_bytes(make_document([make_record(segment="P"), record]).encode("latin-1"))
    return path
