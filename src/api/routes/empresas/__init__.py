"""Rotas da consulta de empresas por CNAE."""
