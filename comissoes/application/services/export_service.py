# comissoes/application/services/export_service.py
from __future__ import annotations

import csv
import io
import json

from ..dtos.proposta_dto import PropostaDTO
from ..dtos.totais_dto import TotaisDTO

_CABECALHO = [
    "ID",
    "Proposta",
    "Valor Total",
    "Valor Pago",
    "Saldo Aberto",
    "% Comissao",
    "Valor Comissao Total",
    "Valor Comissao Paga",
    "% Comissao Paga",
]


class ExportService:
    def exportar_json(self, propostas: list[PropostaDTO], totais: TotaisDTO) -> str:
        payload = {
            "propostas": [p.model_dump(by_alias=True) for p in propostas],
            "totais": totais.model_dump(by_alias=True),
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)

    def exportar_csv(self, propostas: list[PropostaDTO], totais: TotaisDTO) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        output.write("# PROPOSTAS\n")
        writer.writerow(_CABECALHO)
        for p in propostas:
            writer.writerow([
                p.id,
                p.proposta,
                p.valor_total,
                p.valor_pago,
                p.saldo_aberto,
                p.percent_comissao,
                p.valor_comissao_total,
                p.valor_comissao_paga,
                p.percent_comissao_paga,
            ])
        output.write("\n")

        # Totais (rodape da tabela)
        output.write("# TOTAIS\n")
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["Quantidade", totais.quantidade])
        writer.writerow(["Valor Total", totais.valor_total])
        writer.writerow(["Valor Pago", totais.valor_pago])
        writer.writerow(["Saldo Aberto", totais.saldo_aberto])
        writer.writerow(["Valor Comissao Total", totais.valor_comissao_total])
        writer.writerow(["Valor Comissao Paga", totais.valor_comissao_paga])
        writer.writerow(["% Recebido", totais.percent_recebido])
        writer.writerow(["% Comissao Paga", totais.percent_comissao_paga])

        return output.getvalue()
